import sys
import os

LOG_FATAL = -2
LOG_ERROR = -1
LOG_WARN = 0
LOG_INFO = 1
LOG_DEBUG1 = 2
LOG_DEBUG2 = 3
LOG_DEBUG3 = 4

def fatal_exit(exitcode, *msg):
    logger.do_log(LOG_FATAL, os.path.basename(sys.argv[0]), ": fatal: ", *msg)
    sys.exit(exitcode)

def fatal(*msg):
    fatal_exit(1, *msg)

def warn(*msg):
    logger.do_log(LOG_WARN, "warning: ", *msg)

def info(*msg):
    logger.do_log(LOG_INFO, *msg)

def debug1(*msg):
    logger.do_log(LOG_DEBUG1, *msg)

def debug2(*msg):
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    logger.do_log(LOG_DEBUG3, *msg)


class Logger(object):
    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto'):
        self.loglevel = loglevel
        # None means whatever sys.stderr is at write time
        self._file = logfile
        self.set_colors(colors)

    @property
    def file(self):
        if self._file is None:
            return sys.stderr
        return self._file

    def set_colors(self, preference):
        if preference == 'always':
            colors = Colors()
        elif preference == 'auto':
            if self.file.isatty():
                colors = Colors()
            else:
                colors = NoColors()
        elif preference == 'never':
            colors = NoColors()
        else:
            raise ValueError
        self.colors = ColorSchemeDefault(colors)
        self._make_colormap()

    def _make_colormap(self):
        self._colormap = {
                LOG_WARN  : self.colors.WARN,
                LOG_ERROR : self.colors.ERROR,
                LOG_FATAL : self.colors.ERROR,
                LOG_DEBUG1: self.colors.DEBUG1,
                LOG_DEBUG2: self.colors.DEBUG2,
                LOG_DEBUG3: self.colors.DEBUG3
            }

    def _write_log(self, msg):
        self.file.write(msg)

    def _colorize_msg(self, level, *msg):
        try:
            return self.colors.wrap_list(self._colormap[level], list(msg))
        except KeyError:
            return msg

    def _compile_msg(self, *msg):
        l = list(map(str, msg))
        l.append("\n")
        return ''.join(l)

    def do_log(self, level, *msg):
        if self.loglevel < level and level > LOG_FATAL:
            return
        msg = self._colorize_msg(level, *msg)
        msg = self._compile_msg(*msg)
        self._write_log(msg)


class NoColors:
    RESET          = ''
    CYAN           = ''
    BRIGHT_RED     = ''
    BRIGHT_YELLOW  = ''

    def __init__(self):
        pass

    def wrap_list(self, color, l):
        return l

class Colors(NoColors):
    RESET          = '\033[0m'
    CYAN           = '\033[36m'
    BRIGHT_RED     = '\033[1;31m'
    BRIGHT_YELLOW  = '\033[1;33m'

    def __init__(self):
        pass

    def wrap_list(self, color, l):
        l.insert(0, color)
        l.append(self.RESET)
        return l

class ColorSchemeDefault:
    def __init__(self, colors):
        self.WARN = colors.BRIGHT_YELLOW
        self.ERROR = colors.BRIGHT_RED
        self.DEBUG1 = colors.CYAN
        self.DEBUG2 = colors.CYAN
        self.DEBUG3 = colors.CYAN

        self.RESET = colors.RESET
        self.colors = colors

    def wrap_list(self, color, l):
        return self.colors.wrap_list(color, l)


logger = Logger()
