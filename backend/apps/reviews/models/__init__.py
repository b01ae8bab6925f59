from .review import Review, ReviewVote

__all__ = ["Review", "ReviewVote"]
