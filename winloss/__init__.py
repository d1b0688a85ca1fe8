"""winloss - count your wins, losses and opportunities for growth."""
