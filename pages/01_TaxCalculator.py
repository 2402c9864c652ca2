import logging
import math
import os

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from tax_engine import (
    FISCAL_YEAR,
    TAX_SLABS,
    TAX_YEAR,
    calculate_salary_tax,
    describe_slab,
    find_slab,
    slab_breakdown,
)
from utils import (
    NET_COLOR,
    TAX_COLOR,
    append_suffix,
    format_currency,
    parse_salary,
    pie_chart_data,
    update_df_style,
)

logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"))


def show_breakdown(title, gross, tax, net):
    st.markdown(f"#### {title}")
    st.write(f"Gross Salary: {format_currency(gross)}" + append_suffix(gross))
    st.write(f"Tax: {format_currency(tax)}" + append_suffix(tax))
    st.write(f"Net Salary: {format_currency(net)}" + append_suffix(net))


def show_pie_chart(result):
    data = pie_chart_data(result)
    fig = go.Figure(
        go.Pie(
            labels=data["name"],
            values=data["value"],
            marker=dict(colors=[NET_COLOR, TAX_COLOR]),
            texttemplate="%{label} %{percent:.0%}",
            hovertext=[format_currency(value) for value in data["value"]],
            hoverinfo="label+text",
            sort=False,
        )
    )
    fig.update_layout(margin=dict(l=20, r=20, t=30, b=20), showlegend=False)
    st.plotly_chart(fig, use_container_width=True, key="tax_pie_chart")


def show_faqs():
    st.markdown("### FAQs")
    with st.expander("How is the tax calculated?"):
        st.write(
            f"The tax is calculated based on the following slabs for the fiscal year {FISCAL_YEAR}:"
        )
        st.markdown("\n".join(f"- {describe_slab(slab)}" for slab in TAX_SLABS))
    with st.expander("Is this calculation final?"):
        st.write(
            f"This calculation is based on the proposed tax slabs for the fiscal year {FISCAL_YEAR}. "
            "The actual tax liability may vary based on individual circumstances, deductions, "
            "and any changes in tax laws. It's always recommended to consult with a tax "
            "professional for personalized advice."
        )


def tax_calculator_page():
    st.title(f"Pakistan Income Tax Calculator {TAX_YEAR}")

    if "tax_result" not in st.session_state:
        st.session_state.tax_result = None

    monthly_salary_text = st.text_input(
        "Monthly Salary (PKR)", placeholder="Enter your monthly salary"
    )

    if st.button("Calculate Tax", use_container_width=True):
        monthly_salary = parse_salary(monthly_salary_text)
        if math.isnan(monthly_salary):
            st.session_state.tax_result = None
            st.warning("Please enter a valid number for your monthly salary.")
        else:
            st.session_state.tax_result = calculate_salary_tax(monthly_salary)

    result = st.session_state.tax_result
    if result is not None:
        st.markdown("---")

        monthly_col, yearly_col = st.columns(2)
        with monthly_col:
            show_breakdown(
                "Monthly Breakdown",
                result.monthly_salary,
                result.monthly_tax,
                result.monthly_net_salary,
            )
        with yearly_col:
            show_breakdown(
                "Yearly Breakdown",
                result.annual_salary,
                result.annual_tax,
                result.annual_net_salary,
            )

        st.info(f"Effective Tax Rate: {result.effective_rate * 100:.2f}%")
        st.caption(f"Marginal slab: {describe_slab(find_slab(result.annual_salary))}")

        st.markdown("#### Tax Breakdown")
        show_pie_chart(result)

        rows = slab_breakdown(result.annual_salary)
        if rows:
            st.markdown("#### Tax Calculation Table")
            df = pd.DataFrame(rows).set_index("Income Level")
            st.table(update_df_style(df, total_columns=["Taxable In Slab", "Tax For Slab"]))

    st.markdown("---")
    show_faqs()


st.set_page_config(page_title="Income Tax Calculator", page_icon="💰")
tax_calculator_page()
