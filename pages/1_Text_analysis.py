"""Text analysis page - statistics, keywords, sentiment and entities for one text."""

from src.text_analysis.config import load_config, configure_logging
from src.text_analysis.errors import TextAnalysisError
from src.text_analysis.export import ResultExporter, SENTIMENT_COLORS
from src.text_analysis.session import AnalysisSession, input_counts
import streamlit as st
from pathlib import Path
import sys

st.set_page_config(page_title="Text analysis", layout="wide")
st.title("Text analysis")

# Load config
sys.path.insert(0, str(Path(__file__).parent.parent))
try:
    config = load_config(Path(__file__).parent.parent / "config.yaml")
    configure_logging(config['logging']['level'])

    # Initialize session state
    if 'session' not in st.session_state:
        st.session_state.session = AnalysisSession(latency=config['analysis']['latency_seconds'])
except (TextAnalysisError, ValueError) as e:
    st.error(f"Error loading config: {e}")
    st.stop()

if 'input_text' not in st.session_state:
    st.session_state.input_text = ''

session: AnalysisSession = st.session_state.session
exporter = ResultExporter(
    output_dir=config['output']['plot_dir'],
    clipboard_header=config['export']['clipboard_header']
)


def clear_input():
    st.session_state.input_text = ''
    session.clear()


col_input, col_results = st.columns([1, 2])

# ============================================================================
# INPUT
# ============================================================================

with col_input:
    st.subheader("Input Text")
    text = st.text_area("Text", key='input_text', height=300,
                        placeholder="Paste your text here...", label_visibility="collapsed")

    col_analyze, col_clear = st.columns([3, 1])
    with col_analyze:
        analyze_clicked = st.button("Analyze", type="primary", use_container_width=True)
    with col_clear:
        st.button("Clear", on_click=clear_input, use_container_width=True)

    if text:
        characters, words = input_counts(text)
        st.caption(f"Characters: {characters} | Words: {words}")

    if analyze_clicked:
        try:
            with st.spinner("Analyzing..."):
                session.run(text)
        except TextAnalysisError as e:
            st.warning(str(e))

# ============================================================================
# RESULTS
# ============================================================================

with col_results:
    if not session.has_result:
        st.info('Enter text and click "Analyze" to see results')
        st.stop()

    results = session.result
    stats = results.statistics

    tab_analysis, tab_keywords, tab_entities, tab_export = st.tabs(
        ["Analysis", "Keywords", "Entities", "Export"])

    with tab_analysis:
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Characters", stats.characters)
            st.metric("Sentences", stats.sentences)
        with col2:
            st.metric("Words", stats.words)
            st.metric("Avg Word Length", stats.avg_word_length)
        with col3:
            st.metric("Unique Words", stats.unique_words)
            color = SENTIMENT_COLORS[results.sentiment.label]
            st.markdown("Sentiment")
            st.markdown(f"<h3 style='color: {color}; margin-top: 0'>{results.sentiment.label.capitalize()}</h3>",
                        unsafe_allow_html=True)
            st.caption(f"Score: {results.sentiment.score}")

        st.markdown("#### Top Words")
        if results.top_words:
            with st.spinner("Generating plot..."):
                st.image(exporter.plot_top_words(results))
            st.dataframe(exporter.frequency_table(results), hide_index=True)
        else:
            st.write("No words left after filtering stopwords.")

        st.markdown("#### Cleaned Text")
        st.text(results.cleaned)

    with tab_keywords:
        st.markdown("#### Extracted Keywords")
        if results.keywords:
            st.markdown(" ".join(f"`{keyword}`" for keyword in results.keywords))

            st.markdown("#### Word Frequency Distribution")
            with st.spinner("Generating plot..."):
                st.image(exporter.plot_keyword_share(results))
        else:
            st.write("No keywords found")

    with tab_entities:
        st.markdown("#### Named Entities (Capitalized Terms)")
        if results.entities:
            st.markdown(" ".join(f"`{entity}`" for entity in results.entities))
        else:
            st.write("No named entities found")

    with tab_export:
        st.download_button(
            label="Download as JSON",
            data=exporter.to_json_bytes(results),
            file_name=config['export']['filename'],
            mime="application/json",
            use_container_width=True
        )

        st.markdown("##### Copy Results")
        st.caption("Use the copy icon in the corner of the block below.")
        st.code(exporter.clipboard_text(results), language="json")
