"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

**Permanent dataset scanning**

- DATA step and PROC SQL CREATE TABLE detection
- Multi-line statement reassembly
- Block and line comment removal
- Macro context tracking (%macro ... %mend)
- Sorted, deduplicated report with stable ids
- Program/dataset graph (shared datasets)
- CLI with table, JSON and CSV output

### Known Limitations

- Quoted names and names inside string literals are not handled
- Only one comment span per physical line is removed
- Macro variable references (&lib..table) are not resolved
"""
