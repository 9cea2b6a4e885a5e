# Vocabs Registry - a temporal metadata registry for controlled vocabularies
# Copyright (C) 2026 Vocabs Registry contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""General utilities for dealing with strings"""


def capitalize_fully(value: str) -> str:
    """Returns |value| with each word lower-cased apart from its first letter.

    Underscores and whitespace both separate words, and the separators are
    collapsed into single spaces, e.g. "NOT_CURRENT" becomes "Not Current".
    """
    words = value.replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)
