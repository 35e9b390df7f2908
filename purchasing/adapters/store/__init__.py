"""Order store adapters for persisting purchase orders."""
