"""Application layer: request builders, invoker, normalizer and facade."""
