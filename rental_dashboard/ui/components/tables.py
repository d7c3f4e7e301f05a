"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from rental_dashboard.ui.components.formatting import format_brl, format_number


def format_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    rename: Optional[Dict[str, str]] = None,
) -> pd.DataFrame:
    formatted_df = df.copy()
    for column, config in (column_config or {}).items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        decimals = int(config.get("decimals", 0))
        if fmt_type == "currency":
            formatted_df[column] = formatted_df[column].apply(lambda v: format_brl(v, decimals=decimals))
        elif fmt_type == "number":
            formatted_df[column] = formatted_df[column].apply(lambda v: format_number(v, decimals=decimals))
    if rename:
        formatted_df = formatted_df.rename(columns=rename)
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    rename: Optional[Dict[str, str]] = None,
    height: int = 240,
    export_file_name: str = "export.csv",
) -> None:
    if df.empty:
        st.info("No data to display.")
        return

    st.dataframe(
        format_table(df, column_config, rename),
        width="stretch",
        height=height,
        hide_index=True,
    )

    csv_bytes = df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
