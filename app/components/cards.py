"""UI card helpers for Streamlit components."""

import streamlit as st


def metric_card(label: str, value, help_text: str = ""):
    """Render a metric card with optional helper text."""
    col = st.container(border=True)
    with col:
        st.metric(label, value)
        if help_text:
            st.caption(help_text)


def status_chip(label: str, status: str, detail: str = ""):
    """Render a colored status chip (ok, warn or error)."""
    colors = {
        "ok": ("#16a34a", "#ecfdf3"),
        "warn": ("#b45309", "#fffbeb"),
        "error": ("#b91c1c", "#fef2f2"),
    }
    fg, bg = colors.get(status, ("#1f2937", "#f3f4f6"))
    dot = "🟢" if status == "ok" else "🟠" if status == "warn" else "🔴"
    st.markdown(
        f"""
        <div style="background:{bg};color:{fg};padding:12px 14px;border-radius:10px;border:1px solid rgba(0,0,0,0.05);">
            <strong>{dot} {label}</strong><br/>
            <span style="font-size:13px;">{detail}</span>
        </div>
        """,
        unsafe_allow_html=True,
    )


__all__ = ["metric_card", "status_chip"]
