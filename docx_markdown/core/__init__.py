"""GUI-free conversion core: models, DOCX reader, renderers and services."""
