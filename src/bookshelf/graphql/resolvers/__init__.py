"""Resolver package for the GraphQL schema.

Root query and mutation fields and the Book field resolvers delegate here.
Every resolver reads the book store from the GraphQL context.
"""
