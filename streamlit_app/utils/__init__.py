"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session state helpers holding the per-session ViewController
"""
