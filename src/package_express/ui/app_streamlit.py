"""
Streamlit UI for Package Express.

Features:
- Single package quote form with resolution details
- CSV upload for batch quotes
- Export of batch results to CSV
"""
import streamlit as st
import pandas as pd
from datetime import datetime

from package_express.engine import QuoteEngine, Package
from package_express.config.settings import get_settings
from package_express.data.batch_quotes import quote_frame, REQUIRED_COLUMNS


st.set_page_config(
    page_title="Package Express",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return QuoteEngine()


try:
    engine = get_engine()
    settings = get_settings()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Limits
# ============================================================================
with st.sidebar:
    st.header("📦 Shipping Limits")
    with st.container(border=True):
        st.markdown(f"**Max weight:** {settings.max_weight:g}")
        st.markdown(f"**Max width + height + length:** {settings.max_dimensions:g}")
        st.caption(f"Quote = width × height × length × weight / {settings.cost_divisor:g}")


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title("Package Express")
st.caption(f"v1.0 | Quote Engine Active | {datetime.now().strftime('%Y-%m-%d')}")

tab1, tab2 = st.tabs(["⚡ Quote", "📋 Batch"])

with tab1:
    st.write("Welcome to Package Express. Please follow the instructions below.")

    c1, c2, c3, c4 = st.columns(4)
    weight = c1.number_input("Weight", value=0.0, key="weight")
    width = c2.number_input("Width", value=0.0, key="width")
    height = c3.number_input("Height", value=0.0, key="height")
    length = c4.number_input("Length", value=0.0, key="length")

    if st.button("Get Quote", type="primary"):
        quote = engine.calculate(Package(weight=weight, width=width, height=height, length=length))

        if quote.accepted:
            st.metric("Estimated Total", quote.formatted_total())
            st.success("Thank you!")
        else:
            st.warning(quote.error)

        with st.expander("🔍 Resolution Details"):
            st.text(quote.get_trace_text())

with tab2:
    st.caption(f"Upload a CSV with columns: {', '.join(REQUIRED_COLUMNS)}")
    uploaded = st.file_uploader("Packages CSV", type=["csv"])

    if uploaded is not None:
        df = pd.read_csv(uploaded, dtype=str)
        df.columns = [c.strip().lower() for c in df.columns]
        try:
            results = quote_frame(df, engine)
        except ValueError as e:
            st.error(str(e))
        else:
            m1, m2, m3 = st.columns(3)
            m1.metric("Quoted", int((results['status'] == 'quoted').sum()))
            m2.metric("Rejected", int((results['status'] == 'rejected').sum()))
            m3.metric("Invalid", int((results['status'] == 'invalid').sum()))

            st.dataframe(results, use_container_width=True)
            st.download_button(
                "Download Results",
                results.to_csv(index=False),
                file_name="package_quotes.csv",
                mime="text/csv",
            )
