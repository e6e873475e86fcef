"""Hugging Face Spaces entry point for Phrase Finder."""

from phrase_finder.app.app import main

if __name__ == "__main__":
    main()
