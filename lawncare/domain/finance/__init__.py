"""Finance module: inventory purchases and expenses."""
