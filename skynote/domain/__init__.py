"""Pure domain rules: reminder records/snapshots and weather advisories."""
