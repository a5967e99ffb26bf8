"""Money-order domain package.

Request shapes, result helpers and validators for the Akbank money-order
service. Nothing in here talks to the network.
"""
