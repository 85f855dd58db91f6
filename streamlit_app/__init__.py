"""Recipe Explorer Streamlit frontend."""
