"""Domain records, id helpers and the error taxonomy."""
