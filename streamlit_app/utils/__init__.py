"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Recipe fetch wrapper with user-facing error handling
- state: Session state helpers for fetched recipes and filter widgets
"""
