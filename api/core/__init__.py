"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, schema bootstrap, errors, query-string parsing). Keep
feature-specific SQL in the corresponding feature package (e.g. `promotions/`).
"""
