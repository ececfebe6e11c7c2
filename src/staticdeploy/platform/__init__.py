"""Infrastructure shared by the feature packages."""
