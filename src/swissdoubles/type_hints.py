"""Type hints used in Swiss Doubles."""

from typing import Dict, List, Literal, Optional, Set, Tuple

# Player identifiers are opaque strings
PlayerId = str

# Two player ids forming a doubles team
Team = Tuple[str, str]
# One player id (bye) or two (regular team)
MatchSide = Tuple[str, ...]
# Sorted player ids joined with "-"
TeamKey = str

# Bracket round tags (for type hints)
RoundTag = Literal["quarterfinal", "semifinal", "final", "third_place"]
# Supported bracket shapes
BracketType = Literal["none", "final", "semifinals", "quarterfinals"]
# Bye handling modes
ByeMode = Literal["byes_only"]
# Pairing log phases
LogPhase = Literal["bye_selection", "team_formation", "match_pairing"]

# player id -> ids of everyone they partnered
PartnerMap = Dict[PlayerId, Set[PlayerId]]
# team key -> keys of every team they faced
OpponentMap = Dict[TeamKey, Set[TeamKey]]

# A formed team before it is turned into a Match
TeamPair = Tuple["Player", "Player"]
# Two teams facing each other
Matchup = Tuple[TeamPair, TeamPair]
MaybeTeam = Optional[Team]
Teams = List[Team]

#  LocalWords:  TeamPair Matchup
