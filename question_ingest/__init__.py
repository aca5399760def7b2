"""
Question Ingest
===============
Turns user-supplied question files into validated four-option records
for exam paper assembly.

Architecture:
    - Format Detector: Sniffs CSV rows vs numbered plain-text blocks
    - Block Parser: Line state machine for "1." prompts and "الف)" / "A)" options
    - CSV Parser: Quote-aware row tokenizer with optional header row
    - Serializer: Exports records back to CSV or plain text
    - Pipeline: Routes input and classifies empty results

Version: 1.0.0
"""

__version__ = "1.0.0"
