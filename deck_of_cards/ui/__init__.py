"""User interfaces for the deck of cards."""
