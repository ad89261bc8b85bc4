"""
Recipe Dashboard core package.

Contains the recipe source connector, the data models, and the pure
filter-and-aggregate pipeline used by the Streamlit frontend.
"""
