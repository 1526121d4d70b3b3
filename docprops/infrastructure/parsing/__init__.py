"""
Text splitting and rich text folding.
"""
