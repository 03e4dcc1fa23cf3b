"""
Core Package.

Contains the autofix logic:
- Argument scanning and precedence analysis
- Target pattern classification
- Generic rewrite strategies and the transform router
- Specialized handler registry
"""
