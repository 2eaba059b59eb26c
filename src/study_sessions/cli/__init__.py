"""CLI: study"""
