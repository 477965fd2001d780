__package__ = "graphql_fulldate"
__description__ = "RFC 3339 full-date scalar for GraphQL schemas."
__version__ = "0.1.0"
