from pokebattle.clients.pokemontcg import PokemonTCGClient

__all__ = ["PokemonTCGClient"]
