import logging
import math

import pandas as pd

LAKH = 100000
CRORE = 100 * LAKH

CURRENCY_SYMBOL = "Rs"

# Chart colours for the net/tax split
NET_COLOR = "#4CAF50"
TAX_COLOR = "#F44336"


def update_df_style(df, total_columns=None):
    df = df.copy()
    numeric_columns = df.select_dtypes(include="number").columns
    if total_columns:
        df.loc["Total"] = df[total_columns].sum()
    # Remove NA as Empty String
    df = df.fillna("")
    # Add proper number formatting to the columns that were numeric
    for col in numeric_columns:
        df[col] = df[col].map(lambda v: v if v == "" else "{:,.0f}".format(v))

    return df


def parse_salary(text):
    """Parse a salary typed into a text field.

    Returns NaN for empty, non-numeric or infinite input, the way a browser's
    number field would. Callers must check with math.isnan before using it.
    """
    if text is None:
        return float("nan")
    cleaned = str(text).strip().replace(",", "")
    if not cleaned:
        return float("nan")
    try:
        value = float(cleaned)
    except ValueError:
        logging.debug(f"Could not parse salary input: {text!r}")
        return float("nan")
    # "inf" and overflowing input like "1e400"
    if not math.isfinite(value):
        logging.debug(f"Salary input is not finite: {text!r}")
        return float("nan")
    return value


def format_currency(amount):
    if amount is None or math.isnan(amount):
        return "N/A"
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {abs(amount):,.2f}"


def number_to_words(num):
    """
    Converts a number into a human-readable format with suffixes like K, Lakh, and Crore.

    Args:
        num (int or float): The number to convert.

    Returns:
        str: The number converted into words with appropriate suffix.
    """
    if num < 1000:
        return str(num)
    elif num < LAKH:
        value = num / 1000
        suffix = "K"
    elif num < CRORE:
        value = num / LAKH
        suffix = "Lakh"
    else:
        value = num / CRORE
        suffix = "Crore"

    # Format the value to a maximum of 2 decimal places, removing unnecessary trailing zeros
    formatted_value = f"{value:.2f}".rstrip("0").rstrip(".")

    return f"{formatted_value} {suffix}"


def append_suffix(value):
    if math.isnan(value) or value < LAKH:
        return ""
    return f" ({number_to_words(value)})"


def pie_chart_data(result):
    return pd.DataFrame(result.chart_data())
