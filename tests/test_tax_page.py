import pathlib

import pytest
from streamlit.testing.v1 import AppTest

PAGE = str(pathlib.Path(__file__).resolve().parents[1] / "pages" / "01_TaxCalculator.py")


def run_page():
    at = AppTest.from_file(PAGE, default_timeout=30)
    at.run()
    return at


def calculate(at, salary):
    at.text_input[0].input(salary)
    at.button[0].click()
    at.run()
    return at


def test_page_renders_without_results():
    at = run_page()
    assert not at.exception
    assert at.title[0].value == "Pakistan Income Tax Calculator 2024-2025"
    assert len(at.info) == 0
    assert len(at.expander) == 2


def test_page_shows_breakdown_for_valid_salary():
    at = calculate(run_page(), "100000")

    assert not at.exception
    assert len(at.warning) == 0
    text = " ".join(m.value for m in at.markdown)
    assert "Gross Salary: Rs 1,200,000.00" in text
    assert "Tax: Rs 30,000.00" in text
    assert "Net Salary: Rs 97,500.00" in text
    assert at.info[0].value == "Effective Tax Rate: 2.50%"
    assert at.caption[0].value == (
        "Marginal slab: Rs. 600,001 - Rs. 1,200,000: 5% of the amount exceeding Rs. 600,000"
    )


def test_page_shows_pie_chart_and_slab_table():
    at = calculate(run_page(), "100000")

    assert not at.exception
    charts = at.get("plotly_chart")
    assert len(charts) == 1
    # whole-percent slice labels
    assert "%{label} %{percent:.0%}" in charts[0].proto.spec

    table = at.table[0].value
    assert len(table) == 3
    assert [str(label) for label in table.index] == [
        "0 - 600,000",
        "600,000 - 1,200,000",
        "Total",
    ]
    total = table.iloc[-1]
    assert total["Taxable In Slab"] == "1,200,000"
    assert total["Tax For Slab"] == "30,000"


def test_page_faq_wording():
    at = run_page()
    text = " ".join(m.value for m in at.markdown)
    assert "following slabs for the fiscal year 2024-25:" in text
    assert "based on the proposed tax slabs for the fiscal year 2024-25." in text
    assert "Above Rs. 4,100,000: Rs. 700,000 + 35% of the amount exceeding Rs. 4,100,000" in text


@pytest.mark.parametrize("salary", ["not a number", "", "inf", "-Infinity", "1e400"])
def test_page_warns_on_invalid_salary(salary):
    at = calculate(run_page(), salary)

    assert not at.exception
    assert len(at.warning) == 1
    assert len(at.info) == 0
    assert len(at.table) == 0
