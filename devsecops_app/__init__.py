"""DevSecOps sample service exposing process introspection endpoints."""
