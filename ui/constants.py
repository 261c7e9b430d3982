'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

# Shared UI constants
WINDOW_SIZE = (600, 400)
MIN_WINDOW_SIZE = (480, 320)
TITLE_FIELD_W = 300
EDIT_FIELD_W = 200
INDENT_W = 20
ROW_GAP = 2
PADDING = 4
SELECTED_BG_COLOR = wx.Colour(225, 238, 255)
