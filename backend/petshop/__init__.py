"""Pet shop core: clients, pets, grooming appointments and the shop's books."""

__version__ = "1.0.0"
