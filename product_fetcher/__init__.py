"""
Affiliate Product Data Fetcher

Modules:
    models      - Data models (ProductDetails, Product, Provider)
    common      - Shared utilities (config loader, logging, errors, text helpers)
    extraction  - Provider classification, pattern library, field extractors
    fetching    - HTTP fetch collaborator
"""
