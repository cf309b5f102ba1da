"""Rules engine: influence, claims, legality, move application and scoring."""
