# Area: Shared
"""
trivia_duel._shared.display — Console display helpers
=====================================================

ANSI colors, the message kinds the console driver prints, and the
how-to-play text.
"""

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

BLUE = "\033[34m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"
BOLD = "\033[1m"
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# MESSAGE KIND → STYLE
# ══════════════════════════════════════════════════════════════

STYLES = {
    "info": BLUE,
    "success": GREEN,
    "error": RED,
    "warning": YELLOW,
    "question": CYAN + BOLD,
    "score": MAGENTA + BOLD,
    "turn": YELLOW + BOLD,
    "plain": "",
}


def styled(kind: str, text: str) -> str:
    """Wrap `text` in the color for message kind `kind`."""
    style = STYLES.get(kind, "")
    if not style:
        return text
    return f"{style}{text}{RESET}"


HOW_TO_PLAY = f"""
{CYAN}{BOLD}Welcome to Trivia Duel!{RESET}

{CYAN}{BOLD}Objective:{RESET}
Answer questions correctly and score more points than your opponent.

{CYAN}{BOLD}Game Flow:{RESET}
1.  {YELLOW}Choose a Category:{RESET} each turn, pick a category of questions.
2.  {YELLOW}Answer the Question:{RESET}
    *   For multiple-choice questions, enter the number of your answer.
    *   For true/false questions, enter 'true' or 'false'.
3.  {YELLOW}Scoring:{RESET}
    *   Easy questions are worth 1 point.
    *   Medium questions are worth 2 points.
    *   Hard questions are worth 3 points.
4.  {YELLOW}Passing:{RESET} answer incorrectly and the question passes to
    your opponent for a chance to score.
5.  {YELLOW}Skips:{RESET} each player has 2 skips per game. Type 'skip' on
    your turn to swap the question for a new one.
6.  {YELLOW}Winning:{RESET} the player with the most points at the end wins.
7.  {YELLOW}Tie-Breaker:{RESET} on a tie, one extra question decides it.

{GREEN}{BOLD}Good luck!{RESET}
"""
