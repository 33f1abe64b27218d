"""New mycli module.

Copy this directory to ~/.mycli/modules/<name>/ and it is registered in the
dependency bag under the camel-cased directory name.
"""

REQUIRES = ("log",)


def factory(dep):
    log = dep["log"]

    def hello(who="world"):
        log.debug("Hello", who)

    return hello
