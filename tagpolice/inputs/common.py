# -*- coding: utf-8; -*-


class InputError(Exception):

    pass


def args_input(tags):
    for tag in tags:
        yield (tag, None)
