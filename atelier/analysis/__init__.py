"""Pure analysis functions for catalog duplicate and integrity detection."""
