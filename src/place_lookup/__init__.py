"""Place Lookup MCP Server.

Look up a business by name and city: address, summary, categories, links
and star ratings from Yelp and Google Places, ready for note templates.
"""

__version__ = "0.1.0"
