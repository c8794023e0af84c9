"""Infrastructure adapters: package extraction, file checking, rendering."""
