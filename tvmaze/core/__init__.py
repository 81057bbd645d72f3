"""
Couche domaine (core).

Contient les entites TVMaze et la taxonomie des erreurs.
Cette couche ne depend ni de httpx ni de la configuration.

Sous-modules :
- entities/ : Entites (Show, Episode, Person et objets imbriques)
- errors : Erreurs typees et classification des codes HTTP
"""
