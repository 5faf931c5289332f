"""View payloads (day, week, month, reminder banner) built from the rule engine."""
