"""
Recipe Explorer core package.

This package contains everything that does not depend on Streamlit:
- models: Recipe / RecipeDraft schemas
- storage: key-value stores and the recipe persistence adapter
- repository: collection transitions and the write-through repository
- search: recipe filtering
- view_state: selection / modal / theme state and its controller
- forms: add/edit form parsing and validation
"""

__version__ = "0.1.0"
