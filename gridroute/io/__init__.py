"""gridroute 输入读取。"""
