"""Live football match scraping with a freshness-bounded cache."""
