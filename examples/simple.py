"""simple.py"""
import sys

from argvtree import CommandNode

parser = (
    CommandNode("myapp", description="Copy a file somewhere else.")
    .add_flag("verbose", abbr="v", help="Print progress.")
    .add_option("output", abbr="o", default="result.txt", help="Output file.")
    .add_positional("input", help="File to read.")
)

if __name__ == "__main__":
    result = parser.run(sys.argv[1:] or ["-v", "--output", "out.txt", "input.txt"])
    print(f"verbose: {result.flag('verbose')}")
    print(f"output: {result.option('output')}")
    print(f"input: {result.positional('input')}")
