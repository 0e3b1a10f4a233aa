import re

from .models import Thresholds

# Line-leading comment markers across common languages:
#   //          C-family (JavaScript, TypeScript, Java, C, C++, C#, Go, Rust, Swift, Kotlin)
#   /*, *       C-style block comments
#   #           Python, Ruby, Shell, Perl, R, YAML, TOML
#   <!--        HTML, XML, SVG
#   --          SQL, Lua, Haskell, Ada
# Heuristic only: a line starting with `--` or `*` that is code will be dropped.
DEFAULT_COMMENT_PATTERN = re.compile(r"^\s*(//|/\*|\*|#|<!--|--)")

# Score = sum(depth^2) / line_count
#   0-4   simple, flat code
#   4-10  moderate nesting
#   10+   deep nesting, consider refactoring
DEFAULT_THRESHOLDS = Thresholds(medium=4.0, high=10.0)

DIFF_HEADER_PREFIXES = ("diff ", "index ", "+++", "---", "@@")

INCLUDE_CHOICES = ("additions", "deletions", "both")

LEVEL_ORDER = ("low", "medium", "high")
