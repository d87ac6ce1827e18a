"""
Data access layer.

Each repository owns the SQL for one table (joined to the tables it
references for display) and returns typed row records.  Repositories
contain no business rules and never raise for a missing row: reads
return ``None`` and writes return the affected-row count.  Only
storage failures (``sqlite3.Error``) propagate.
"""
