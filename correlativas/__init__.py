"""
Correlativas - Course progress tracker with prerequisite ("correlativas") checking.

Loads a static course catalog, lets the student mark courses as taken or
passed, persists that locally and shows which courses are unlocked.

Usage:
    streamlit run app.py
"""

__version__ = "1.0.0"
