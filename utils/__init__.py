"""
Non-UI building blocks of the Folder Selector app: configuration, environment
detection, native dialogs, the directory browser state and the selection entry point.
"""
