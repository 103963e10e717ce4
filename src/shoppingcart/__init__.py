"""Shopping cart with discounted checkout and order persistence."""
