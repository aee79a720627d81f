#!/usr/bin/env python3
"""
run.py - Main entry point for SquareFour

Usage:
    python run.py play [--size N] [--player-a NAME] [--player-b NAME] [--no-color]
    python run.py check --size N --position 0,0,1,...
"""

from squarefour.interfaces.cli import main


if __name__ == "__main__":
    main()
