import getopt
import re
import sys
import os

import bintree
from . import log
from .exception import BinTreeError, InputError
from .tree import general
from .tree.searchtree import DEFAULT_LEVELS, SearchTree

MENU = (
        "Invalid command. Possible commands: ",
        "(I)nsert <int>",
        "(D)elete <int>",
        "(S)earch <int>",
        "(P)rint",
        "p(R)eorder",
        "i(N)order",
        "p(O)storder",
        "(C)reate <int...>",
        "The create command takes two lines beginning with C. "
        "The first line takes the preorder listing of a tree. "
        "The second line takes the inorder listing of a tree. "
        "It does not replace the current tree, only prints it.",
        "(E)xit",
    )

_integer_pattern = re.compile(r'^[+-]?[0-9]+$')

# keys are bounded like 32 bit signed integers
INT_MIN = -2**31
INT_MAX = 2**31 - 1

def _get_integer(arguments, index):
    if index >= len(arguments) or not _integer_pattern.match(arguments[index]):
        raise InputError("Could not parse integer")
    value = int(arguments[index])
    if value < INT_MIN or value > INT_MAX:
        raise InputError("Could not parse integer")
    return value

def _get_key(arguments, options):
    k = _get_integer(arguments, 0)
    if k < options['min_key'] or k > options['max_key']:
        raise InputError("Integer must be in the range [{0:d}, {1:d}]".format(
            options['min_key'], options['max_key']))
    return k

def parse_line(line):
    """Split a shell line into the command character and its arguments.

    Returns (None, []) for blank lines."""
    tokens = line.strip().upper().split()
    if not tokens:
        return (None, [])
    return (tokens[0][0], tokens[1:])


class Shell(object):
    def __init__(self, tree, outfile, options):
        self.tree = tree
        self.out = outfile
        self.options = options
        # preorder listing waiting for the second line of a C command
        self.pending = None

    def println(self, *msg):
        self.out.write(''.join(map(str, msg)) + '\n')

    def handle(self, command, arguments):
        """Execute one command. Returns False once the shell should exit."""
        if self.pending is not None and command != 'C':
            self.println("Expected second line, canceling C command")
            self.pending = None
        try:
            return self._dispatch(command, arguments)
        except BinTreeError as e:
            self.println(e)
            if command == 'C':
                self.pending = None
                self.println("Exiting C command")
        return True

    def _dispatch(self, command, arguments):
        tree = self.tree
        levels = self.options['levels']
        if command == 'I':
            k = _get_key(arguments, self.options)
            tree.insert(k)
            self.println("Inserted ", k)
        elif command == 'D':
            k = _get_integer(arguments, 0)
            tree.delete_key(k)
            self.println("Deleted ", k)
        elif command == 'S':
            k = _get_integer(arguments, 0)
            node, depth = tree.search_depth(k)
            if node is None:
                self.println("Could not find ", k)
            else:
                self.println("Depth of ", k, " is ", depth)
        elif command == 'P':
            self.println(tree.render(levels))
            if tree.height() > levels:
                self.println("Lower levels hidden...")
        elif command == 'R':
            self.println("Preorder list: ", list(general.preorder(tree.root())))
        elif command == 'N':
            self.println("Inorder list: ", list(general.inorder(tree.root())))
        elif command == 'O':
            self.println("Postorder list: ", list(general.postorder(tree.root())))
        elif command == 'C':
            keys = [_get_integer(arguments, i) for i in range(len(arguments))]
            if self.pending is None:
                self.pending = keys
            else:
                preorder_keys, self.pending = self.pending, None
                root = general.reconstruct(preorder_keys, keys)
                self.println(general.render(root, levels))
        elif command == 'E':
            self.println("Exiting interactive tree...")
            return False
        else:
            for line in MENU:
                self.println(line)
        return True

def run_shell(tree, infile, outfile, options):
    shell = Shell(tree, outfile, options)
    if options['banner']:
        shell.println("Entering interactive tree (type MENU for help): ")
        outfile.flush()
    for line in infile:
        command, arguments = parse_line(line)
        if command is None:
            continue
        log.debug1("command ", command, " ", arguments)
        if not shell.handle(command, arguments):
            break
        outfile.flush()
    outfile.flush()
    return tree


def _open(filename, mode):
    return open(filename, mode, encoding="utf-8")

def open_streams(options):
    infile = sys.stdin
    outfile = sys.stdout
    try:
        if options['input'] not in (None, '-'):
            infile = _open(options['input'], "r")
    except IOError as e:
        log.fatal("unable to open input file: \n", str(e))
    try:
        if options['output'] not in (None, '-'):
            outfile = _open(options['output'], "w")
    except IOError as e:
        if infile is not sys.stdin:
            infile.close()
        log.fatal("unable to open output file: \n", str(e))
    return (infile, outfile)

def interactive_main(argv):
    log.logger = log.Logger()
    options = parse_arguments(argv)

    infile, outfile = open_streams(options)
    log.info("bintree {}: reading commands from {}".format(
        bintree.__version__, getattr(infile, 'name', '-')))
    try:
        run_shell(SearchTree(), infile, outfile, options)
    except IOError as e:
        log.fatal(str(e))
    finally:
        if infile is not sys.stdin:
            infile.close()
        if outfile is not sys.stdout:
            outfile.close()
    return 0

def default_options():
    opts = {
            'input' : None,
            'output' : None,
            'levels' : DEFAULT_LEVELS,
            'min_key' : 0,
            'max_key' : 99,
            'banner' : True,
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def _int_option(opt, arg, minimum=None):
    try:
        value = int(arg)
    except ValueError:
        invalid_argument(opt, arg)
    if minimum is not None and value < minimum:
        invalid_argument(opt, arg)
    return value

def parse_arguments(argv):
    long_opts = [
            'help',
            'levels=',
            'min-key=',
            'max-key=',
            'quiet',
            'verbose',
            'color=',
            'version'
    ]
    options = default_options()
    opts = 'hl:qv'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-l', '--levels'):
            options['levels'] = _int_option(opt, arg, 1)

        elif opt in ('--min-key',):
            options['min_key'] = _int_option(opt, arg)

        elif opt in ('--max-key',):
            options['max_key'] = _int_option(opt, arg)

        elif opt in ('-q', '--quiet'):
            options['banner'] = False

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    if len(args) > 2:
        log.fatal_exit(2, 'too many arguments', "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")
    if len(args) >= 1:
        options['input'] = args[0]
    if len(args) == 2:
        options['output'] = args[1]

    if options['min_key'] > options['max_key']:
        log.fatal_exit(2, 'Invalid arguments: --min-key exceeds --max-key')

    return options

def version():
    sys.stdout.write("bintree " + bintree.__version__ + "\n")


def usage(program_name):
    def_opts = default_options()
    sys.stdout.write(
            'Usage: {0:s} [option]... [input [output]]'
            .format(program_name))
    sys.stdout.write(
'''
Interactive binary search tree. Commands are read line by line from INPUT
(default stdin) and results are written to OUTPUT (default stdout).
Use '-' for either to select the standard stream.

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
      --color=WHEN           colorize log output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Tree:
  -l, --levels=N             number of tree levels shown by the P and C
                               commands (default {levels:d})
      --min-key=N
      --max-key=N            range of keys accepted by the I command
                               (default [{min_key:d}, {max_key:d}])
  -q, --quiet                do not print the greeting line
'''.format(levels=def_opts['levels'], min_key=def_opts['min_key'],
        max_key=def_opts['max_key'])
    )

def main():
    try:
        sys.exit(interactive_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
