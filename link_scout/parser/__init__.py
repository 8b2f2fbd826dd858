"""Document parsers: HTML pages and XML sitemaps."""
