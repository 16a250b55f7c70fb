# UI package init
