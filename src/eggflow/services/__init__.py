"""External service clients for eggflow."""
