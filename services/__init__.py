"""Service layer: store, validation, access control and business rules."""
