"""Application – admission use-cases (framework-agnostic)."""
