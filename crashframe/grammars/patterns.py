"""
Grammars for the stack trace conventions a backtrace may use.

Each regex is anchored to the whole line. Grammars that embed another
convention list it as a later alternative, so the first matching
alternative wins.
"""

from crashframe.grammars.base import RegexGrammar, compile_frame_regex
from crashframe.models.frame import FormatPattern


# Interpreter frames such as
#   ./spec/notice_spec.rb:43:in `block (3 levels) in <top (required)>'
NATIVE = compile_frame_regex(r"""
    \A
    (?P<file>.+)             # Matches './spec/notice_spec.rb'
    :
    (?P<line>\d+)            # Matches '43'
    :in\s
    [`'](?P<function>.*)'    # Matches "`block (3 levels) in <top (required)>'"
    \Z
""")

# Embedded VM frames such as
#   org.jruby.ast.NewlineNode.interpret(NewlineNode.java:105)
EMBEDDED_VM = compile_frame_regex(r"""
    \A
    (?P<function>[^(]+)                     # Matches 'org.jruby.ast.NewlineNode.interpret'
    \(
      (?P<file>
        (?:uri:classloader:/.+(?=:))        # Matches 'uri:classloader:/META-INF/jruby.home/protocol.rb'
        |
        (?:uri_3a_classloader_3a_.+(?=:))   # Matches 'uri_3a_classloader_3a_/gems/...'
        |
        [^:]+                               # Matches 'NewlineNode.java'
      )
      :?
      (?P<line>\d+)?                        # Matches '105'
    \)
    \Z
""")

# What a stack frame probably looks like when a backtrace was set by hand.
GENERIC = compile_frame_regex(r"""
    \A
    (?:from\s)?
    (?P<file>.+)                  # Matches '/foo/bar/baz.ext'
    :
    (?P<line>\d+)?                # Matches '43' or nothing
    (?:
      in\s`(?P<function>.+)'      # Matches "in `func'"
    |
      :in\s(?P<function_alt>.+)   # Matches ":in func"
    )?                            # ... or nothing
    \Z
""")

# PL/SQL frames raised through the Oracle driver, such as
#   ORA-06512: at "STORE.LI_LICENSES_PACK", line 1945
DATABASE = compile_frame_regex(r"""
    \A
    ORA-\d{5}
    :\sat\s
    (?:"(?P<function>.+)",\s)?
    line\s(?P<line>\d+)
    \Z
""")

# Script runtime frames with a column, such as
#   compile ((execjs):6692:19)
TRANSPILED_SCRIPT_CALL = compile_frame_regex(r"""
    \A
    (?P<function>.+)\s\((?P<file>.+):(?P<line>\d+):\d+\)
    \Z
""")

# Anonymous script runtime frames, such as
#   bootstrap_node.js:467:3
TRANSPILED_SCRIPT_LOCATION = compile_frame_regex(r"""
    \A
    (?P<file>.+):(?P<line>\d+):\d+(?P<function>)
    \Z
""")


NATIVE_GRAMMAR = RegexGrammar(FormatPattern.NATIVE, [NATIVE])

EMBEDDED_VM_GRAMMAR = RegexGrammar(FormatPattern.EMBEDDED_VM, [EMBEDDED_VM])

GENERIC_GRAMMAR = RegexGrammar(FormatPattern.GENERIC, [GENERIC])

DATABASE_GRAMMAR = RegexGrammar(FormatPattern.DATABASE, [DATABASE, GENERIC])

# Mixed traces carry interpreter frames for the host part of the chain.
TRANSPILED_SCRIPT_GRAMMAR = RegexGrammar(
    FormatPattern.TRANSPILED_SCRIPT,
    [TRANSPILED_SCRIPT_CALL, TRANSPILED_SCRIPT_LOCATION, NATIVE],
)

ALL_GRAMMARS = [
    NATIVE_GRAMMAR,
    EMBEDDED_VM_GRAMMAR,
    DATABASE_GRAMMAR,
    TRANSPILED_SCRIPT_GRAMMAR,
    GENERIC_GRAMMAR,
]
