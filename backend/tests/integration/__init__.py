"""
Integration tests package.

Contains tests that drive the PetShop facade end to end: clients, pets,
bookings and the ledgers working together.
"""
