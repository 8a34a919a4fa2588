"""Sample flight crew scheduling instances."""
