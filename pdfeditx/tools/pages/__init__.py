"""Single-document page tools: info, reorder, extract, delete and rotate."""
