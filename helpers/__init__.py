"""Pure helpers - result math, date rules and random sources."""
