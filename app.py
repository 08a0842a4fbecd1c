# app.py
import json

import streamlit as st
from dotenv import load_dotenv

from threetaps.client import ThreeTapsClient
from threetaps.config import load_settings
from threetaps.errors import ThreeTapsError, ValidationError
from threetaps.exporters import results_frame

load_dotenv()

# -------------------------
# Streamlit page setup
# -------------------------
st.set_page_config(page_title="3taps Search Explorer", layout="wide")
st.title("3taps Search Explorer")

try:
    settings = load_settings()
except ValueError as e:
    st.error(str(e))
    st.stop()

client = ThreeTapsClient.from_settings(settings)

with st.sidebar:
    st.caption(f"Server: {settings.server}")
    st.caption("Status credentials: " + ("configured" if settings.has_credentials else "not set"))
    if st.button("Check system status"):
        try:
            st.json(client.system_status())
        except ThreeTapsError as e:
            st.error(f"System status unavailable: {e}")

# -------------------------
# UI Inputs
# -------------------------
col_a, col_b, col_c = st.columns(3)
with col_a:
    location = st.text_input("Location (3-char codes, join with +OR+)", "LAX+OR+NYC")
    source = st.text_input("Source (5-char code)", "")
with col_b:
    category = st.text_input("Category (4-char codes, join with +OR+)", "VAUT")
    text = st.text_input("Text (heading or body)", "")
with col_c:
    annotations = st.text_input("Annotations (JSON map)", "")
    rpp = st.number_input("Results per page (-1 for all)", min_value=-1, max_value=1000, value=10, step=1)

retvals = st.text_input("Fields to return", "category,location,heading,externalURL,timestamp")

params = {
    "location": location.strip() or None,
    "category": category.strip() or None,
    "source": source.strip() or None,
    "text": text.strip() or None,
    "annotations": annotations.strip() or None,
    "retvals": retvals.strip() or None,
}

run_btn = st.button("Search")

# -------------------------
# Run Search
# -------------------------
if run_btn:
    try:
        with st.spinner("Counting matches..."):
            count = client.count(**params)
        with st.spinner("Searching..."):
            result = client.search(rpp=int(rpp), **params)
    except ValidationError as e:
        st.error(f"Invalid {e.field}: {e.message}")
        st.stop()
    except ThreeTapsError as e:
        st.error(f"Search failed: {e}")
        st.stop()

    if not result.get("success", True):
        st.error(f"3taps reported an error: {result.get('error')}")
        st.stop()

    st.success(
        f"Matches: {count.get('count')} | "
        f"Returned: {len(result.get('results', []) or [])} | "
        f"Server time: {result.get('execTimeMs')} ms"
    )

    df = results_frame(result)
    if df.empty:
        st.warning("No postings found. Try widening the location or category.")
        st.stop()

    st.dataframe(df, use_container_width=True)
    st.download_button(
        "Download postings.csv",
        df.to_csv(index=False).encode("utf-8"),
        "postings.csv",
        "text/csv",
    )

    with st.expander("Raw response"):
        st.code(json.dumps(result, indent=2))
