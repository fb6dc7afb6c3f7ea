"""Main Streamlit application entry point."""

import streamlit as st

st.set_page_config(
    page_title="NLP Analysis Tool",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.title("NLP Analysis Tool")

st.markdown("""
### Text Processing: Keywords, Sentiment and Entities
Paste a block of text and get lightweight lexical statistics for it.

### Text Analysis
**Statistics and Word Frequency**
- Characters, words, unique words and sentences
- Average word length
- Most frequent words after stopword filtering

### Keywords
- The five most frequent meaningful words
- Frequency distribution chart

### Sentiment
- Word list heuristic: positive and negative words are counted against each other

### Entities
- Capitalized words found in the original text (a simple pattern, not a trained model)

### Export
- Download the full result as JSON or copy it to the clipboard

### Getting Started

1. Use the sidebar to open the Text analysis page
2. Paste your text and click Analyze
""")
