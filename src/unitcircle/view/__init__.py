"""
The VIEW layer draws the scene and writes the value panel.

`renderer` and `panel` only talk to the abstract interfaces in `surface`,
the Qt implementations of those interfaces live in `widgets`.
"""
