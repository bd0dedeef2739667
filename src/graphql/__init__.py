"""GraphQL schema, context and resolvers for the posts subgraph."""
