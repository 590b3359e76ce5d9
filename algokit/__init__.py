"""Classic algorithms: sorting, searching, knapsack, graphs, arrays, number theory, text, trees and linked lists."""

__version__ = "0.1.0"