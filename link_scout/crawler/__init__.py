"""Crawl engine: fetching, probing and the admission ledger."""
