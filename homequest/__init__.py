"""
HomeQuest Listing API.
Real-estate listings, agents, enquiries, user accounts and saved properties.
"""

__version__ = "1.0.0"
