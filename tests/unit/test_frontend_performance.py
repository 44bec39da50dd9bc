"""
Monkey Front-End Performance Checks

Measures lexing and parsing on generated inputs of increasing size:
- Tokens per second for the lexer
- Parse time for many let statements
- Memory growth while parsing a large program
"""

import time
from dataclasses import dataclass

import pytest
from monkey import Driver, TokenType
from monkey.frontend import Lexer

psutil = pytest.importorskip("psutil")


@dataclass
class TimingResult:
    """Results from a timing run."""
    test_name: str
    statements: int
    elapsed_ms: float
    success: bool


def generate_program(statements: int) -> str:
    """Build a program of let statements with non-trivial right-hand sides."""
    lines = []
    for i in range(statements):
        lines.append(f"let value_{chr(97 + i % 26)} = fn(a, b) {{ if (a < b) {{ return a + {i}; }} }};")
    return "\n".join(lines)


def measure_parse(driver: Driver, source: str, iterations: int = 3) -> float:
    """Return the average parse time in milliseconds."""
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        driver.parse(source)
        times.append((time.perf_counter() - start) * 1000)
    return sum(times) / len(times)


PROGRAM_SIZES = {
    "tiny": 10,
    "small": 100,
    "medium": 1000,
    "large": 5000,
}


class TestLexerThroughput:
    """Throughput checks for the lexer."""

    def test_lexes_large_input(self):
        """Test that a large input lexes to EOF in reasonable time."""
        source = generate_program(PROGRAM_SIZES["large"])
        start = time.perf_counter()
        count = sum(1 for _ in Lexer(source))
        elapsed = time.perf_counter() - start

        assert count > PROGRAM_SIZES["large"] * 10
        assert elapsed < 30.0

    def test_garbage_input_terminates(self):
        """Test that a long run of illegal characters terminates."""
        source = "@#$%^&[]." * 2000
        tokens = list(Lexer(source))
        assert tokens[-1].type is TokenType.EOF
        assert len(tokens) == len(source) + 1


class TestParserScaling:
    """Scaling checks for the parser."""

    @pytest.mark.parametrize("size_name", list(PROGRAM_SIZES))
    def test_parse_sizes(self, size_name):
        """Test that every statement is parsed at each size."""
        statements = PROGRAM_SIZES[size_name]
        driver = Driver()
        source = generate_program(statements)

        elapsed = measure_parse(driver, source, iterations=1)
        result = driver.parse(source)
        timing = TimingResult(size_name, statements, elapsed, result.success)

        assert timing.success
        assert len(result.program.statements) == statements
        assert timing.elapsed_ms < 60_000

    def test_memory_growth_is_bounded(self):
        """Test that parsing a large program does not balloon process memory."""
        process = psutil.Process()
        source = generate_program(PROGRAM_SIZES["large"])
        driver = Driver()

        before = process.memory_info().rss
        result = driver.parse(source)
        after = process.memory_info().rss

        assert result.success
        assert after - before < 256 * 1024 * 1024
