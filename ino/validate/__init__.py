"""Composable validators producing readable error messages."""