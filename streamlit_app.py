"""ABOUTME: Entry point for Streamlit Community Cloud deployment.
ABOUTME: Delegates to the main app module."""

import typeanalyzer.app.main  # noqa: F401
