"""HTTP API for the payroll report service."""
