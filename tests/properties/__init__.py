from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    SimilarSequenceGenerator,
    EdgeCaseGenerator,
    TestCaseGenerator,
    LevenshteinCase,
    generate_test_cases
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "EdgeCaseGenerator",
    "TestCaseGenerator",
    "LevenshteinCase",
    "generate_test_cases"
]
