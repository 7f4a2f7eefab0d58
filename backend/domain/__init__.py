"""Domain layer: persistence ports and errors, free of framework code."""
