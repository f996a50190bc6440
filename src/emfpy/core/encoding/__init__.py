"""Wire encoders for EMF documents."""
