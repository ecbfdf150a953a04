"""
Farmer Advisory Dataset Agents
==============================

Classifies farmer queries and gathers supporting data from the dataset
agents (weather, crop advisory, market price, soil health, schemes).
"""

__version__ = "0.1.0"
