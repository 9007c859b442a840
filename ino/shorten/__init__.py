"""Abstract database access types, transaction scopes and column-to-field mapping."""