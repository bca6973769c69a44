"""Console front-end for the blackjack engine."""
