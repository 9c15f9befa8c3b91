"""
Gemini API key presence check and key selection for FootyAI.
"""
