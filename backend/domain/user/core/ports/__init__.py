"""User persistence port."""
