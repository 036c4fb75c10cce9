"""語言相關的語音鍵解析實作"""
