"""UI subpackage - Streamlit console."""
