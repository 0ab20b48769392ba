"""Services Layer - business rules orchestrated over the record store."""
