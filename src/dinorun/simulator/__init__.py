"""Desktop simulator for DINO RUN."""
