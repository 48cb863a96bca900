"""PyQt6 front end: renders the fogged board and feeds clicks to the controller."""
